"""Reference icon assets."""

from .template_store import TemplateAssets, freeze_icons, load_template_assets

__all__ = ['TemplateAssets', 'freeze_icons', 'load_template_assets']
