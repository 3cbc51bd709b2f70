from bjsim.blackjack.blackjack import main

if __name__ == "__main__":
    main()
