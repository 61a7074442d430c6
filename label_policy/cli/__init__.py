"""Command line interface for the label policy auditor."""
