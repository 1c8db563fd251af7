from file_manager.cli import main


if __name__ == "__main__":
    # Usage: python main.py --username=<name>
    raise SystemExit(main())
