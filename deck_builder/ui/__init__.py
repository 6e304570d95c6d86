"""User interface layers for deck builder."""
