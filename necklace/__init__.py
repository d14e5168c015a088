"""
ADD NECKLACE - Virtual necklace try-on with Gemini image editing

Components:
- images.py: Turns uploaded files into encoded images
- editor.py: Sends image edits to Gemini Image Editing
- orchestrator.py: Removes the worn necklace, then adds the new one
- session.py: Holds the browser session state behind the UI
- app.py: Streamlit page (streamlit run necklace/app.py)
"""

__version__ = '1.0.0'
