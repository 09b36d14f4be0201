from gorun.cli.main import main

main()
