"""JetNotes: a notes app with a navigation drawer, served with NiceGUI."""

__version__ = "0.1.0"
