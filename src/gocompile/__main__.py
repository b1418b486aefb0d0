from gocompile.cli.main import main

main()
