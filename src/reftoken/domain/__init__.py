"""Domain layer - token types and collaborator contracts with no dependencies on other layers.

This layer contains:
- types: token kinds, spans, triggers and display segments
- protocols: interfaces the host supplies (candidate sources, label and secret lookups)
- candidates: validated candidate records offered as completions
- events: engine notifications and the synchronous event bus

All other layers depend on the domain layer.
"""
