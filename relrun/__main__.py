from relrun.cli.app import main

main()
