from prstatus.cli.cli import main

main()
