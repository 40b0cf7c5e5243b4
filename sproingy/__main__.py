from sproingy.main import main

main()
