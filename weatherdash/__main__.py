from weatherdash.cli import main

main()
