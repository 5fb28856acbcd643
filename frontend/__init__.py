"""Tkinter front end for the calculator core."""
