"""
ADD NECKLACE Render - HTML fragments for the Streamlit page, built from Jinja2 templates.
"""

from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader

from necklace.images import EncodedImage

TEMPLATES_DIR = Path(__file__).parent / 'templates'


class PageRenderer:
    """Renders the page chrome and the result card."""

    def __init__(self, templates_dir: Optional[Path] = None):
        self.templates_dir = templates_dir or TEMPLATES_DIR
        self.jinja_env = Environment(loader=FileSystemLoader(str(self.templates_dir)))

    def styles(self) -> str:
        css = (self.templates_dir / 'styles.css').read_text()
        return f"<style>\n{css}\n</style>"

    def header(self, title: str = "Add Necklace",
               tagline: str = "Virtually try on necklaces with the power of AI.") -> str:
        template = self.jinja_env.get_template('header.html')
        return template.render(title=title, tagline=tagline)

    def footer(self, provider: str = "Google Gemini") -> str:
        template = self.jinja_env.get_template('footer.html')
        return template.render(provider=provider)

    def result(self, image: EncodedImage, heading: str = "Your Masterpiece!") -> str:
        """Result card showing the image as a data URI."""
        template = self.jinja_env.get_template('result.html')
        return template.render(
            image=image,
            heading=heading,
            alt="Generated with necklace",
            dimensions=image.dimensions(),
        )
