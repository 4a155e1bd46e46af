"""Allow running as: python -m xfertime"""
from xfertime.main import main

if __name__ == "__main__":
    main()
