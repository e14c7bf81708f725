"""Textual front end for the kanban board.

Run it with::

    kb board
"""
