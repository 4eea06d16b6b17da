from filebox.cli.main import main

main()
