"""Allow ``python -m token_invalidator``."""

from token_invalidator.adapters.discord.launcher import main

if __name__ == "__main__":
    main()
