"""
fourinarow.interfaces - Front ends for playing the game
"""
