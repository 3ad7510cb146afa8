"""Infrastructure layer — reading documents from disk.

This layer depends on stdlib and third-party libs (ruamel.yaml).
It must never import from domain, services, commands, or output.
The service layer bridges between documents and the validator.
"""
