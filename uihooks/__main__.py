"""``python -m uihooks`` opens the demo window, like ``uihooks-demo``."""

from main import main

if __name__ == "__main__":
    main()
