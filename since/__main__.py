from since.cli import main

main()
