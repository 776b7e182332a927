""" Main entry point """

from .cli.ptgen import ptgen


if __name__ == "__main__":
    ptgen()
