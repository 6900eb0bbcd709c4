from solidkit.cli.main import main

main()
