# Filename: __init__.py
# Author: Rich Lewis @RichLewis007
# Description: Worker components package for trash operations. Exports worker modules
#              for moving paths to trash and clearing trash directories.

__all__ = ["clear_worker", "move_worker"]
