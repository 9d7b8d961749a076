from big2.cli import main

main()
