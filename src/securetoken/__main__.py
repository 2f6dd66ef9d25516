"""Entry point for 'python -m securetoken' command."""

from securetoken.cli import main

if __name__ == "__main__":
    main()
