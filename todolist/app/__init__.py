"""Application composition layer for the Tkinter GUI.

``main.py`` wires the to-do view to the view models; views hold no list
state of their own.
"""
