"""
Ruversi: rule engine and console game for 8x8 Reversi.
"""
