from nibbles.game import main

main()
