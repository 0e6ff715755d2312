from stdread import main

main()
