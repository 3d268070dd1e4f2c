from squares.app import main

main()
