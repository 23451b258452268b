"""Allow `python -m logsweep`."""

from logsweep.cli import main

if __name__ == "__main__":
    main()
