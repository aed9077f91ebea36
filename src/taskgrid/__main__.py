from taskgrid.cli.main import main

main()
