"""Allow ``python -m netkit``."""

from .cli import run

if __name__ == "__main__":
    run()
