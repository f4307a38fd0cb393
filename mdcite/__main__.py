from mdcite.cli import main

main()
