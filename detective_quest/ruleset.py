"""
Static game data for the Detective Quest mansion.
"""

# Rooms are referenced by their position in this list; index 0 is the root.
MANSION_ROOMS = [
    {"name": "Hall de Entrada", "clue": "Pegada suja"},
    {"name": "Sala de Estar", "clue": "Perfume feminino caro"},
    {"name": "Biblioteca", "clue": "Livro rasgado"},
    {"name": "Cozinha", "clue": "Copo com fragmento de esmalte"},
    {"name": "Jardim", "clue": "Filtro de cigarro"},
    {"name": "Porão", "clue": "Luva encharcada"},
]

# (parent, left child, right child); None marks a missing path
MANSION_LINKS = [
    (0, 1, 2),
    (1, 3, 4),
    (2, None, 5),
]

CLUE_SUSPECTS = [
    ("Pegada suja", "Carlos"),
    ("Perfume feminino caro", "Dona Beatriz"),
    ("Livro rasgado", "Professor Otávio"),
    ("Copo com fragmento de esmalte", "Dona Beatriz"),
    ("Filtro de cigarro", "Carlos"),
    ("Luva encharcada", "Professor Otávio"),
]

# Clues pointing at the accused needed for a guilty verdict
GUILTY_THRESHOLD = 2

# Game phases
PHASE_EXPLORATION = "exploration"
PHASE_ACCUSATION = "accusation"
PHASE_COMPLETE = "complete"
