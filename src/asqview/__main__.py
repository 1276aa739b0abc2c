"""python -m asqview"""

from asqview.presentation.cli import main

if __name__ == "__main__":
    main()
