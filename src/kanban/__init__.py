"""Terminal kanban board.

Example:
    from kanban.controller import AppController
    from kanban.keys import Key

    controller = AppController()
    controller.handle_key(Key.char_key("i"))
"""

__version__ = "0.1.0"
