from deck_builder.ui.cli import main

if __name__ == "__main__":
    main()
