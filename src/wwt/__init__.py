"""
wwt: "what was that" - a memory aid for the terminal.

Remember short named things (usually commands) with a description,
then find them again by fuzzy-matching what you remember of the description:
- `wwt remember <name> <description>`
- `wwt find <query>`
- `wwt forget <name>`
"""

__version__ = "0.1.0"
