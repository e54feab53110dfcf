"""
Glove Tracker - Main Entry Point
Usage: python main.py [--hsv gloveHSV.txt] [--camera N] [--debug]
"""
from glovehand.ui.app import main

if __name__ == "__main__":
    main()
