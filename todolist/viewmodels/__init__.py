"""ViewModel package for to-do list UI state and command surfaces.

Call context:
    ``todolist/app/main.py`` and ``todolist/web_ui`` import the concrete
    viewmodels from this package and bind view callbacks to them.

Dependencies:
    Modules in this package depend on domain types only. Rendering and
    toolkit code stay in the view layers.

Responsibilities:
    - Hold the ordered list and the editing slot.
    - Hold entry-form state for new items.
    - Project items into view-facing row DTOs.
"""
