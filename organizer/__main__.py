"""Allow ``python -m organizer``."""

from organizer.cli.main import main

if __name__ == "__main__":
    raise SystemExit(main())
