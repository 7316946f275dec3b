"""Run the Letter Boxed solver with `python -m letterboxed`."""

from letterboxed import main

if __name__ == "__main__":
    main()
