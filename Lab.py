"""
Streamlit frontend for the Viral Creative Lab (Lab view).

This is the main entry point for the application. It handles the UI and wires
the campaign actions to the Gemini and Veo clients.
"""

from app import *  # Re-export everything so Streamlit runs the same UI
