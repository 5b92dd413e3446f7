"""
Run the game: python -m game.yar
"""

from .window import main

if __name__ == "__main__":
    main()
