"""Inline SVG icons, one per ``IconKind`` plus the UI glyphs the page needs."""

from folio.models import IconKind

# 24x24 viewBox, stroked outlines so they inherit currentColor.
_PATHS: dict[str, str] = {
    IconKind.PALETTE.value: (
        '<path d="M12 3a9 9 0 0 0 0 18c1.1 0 1.6-.8 1.6-1.6 0-.9-.7-1.3-.7-2.2 0-.9.7-1.6 1.6-1.6H17a4 4 0 0 0 4-4'
        'C21 6.8 17 3 12 3z"/><circle cx="7.5" cy="11" r="1.2"/><circle cx="10" cy="7" r="1.2"/>'
        '<circle cx="15" cy="7.5" r="1.2"/>'
    ),
    IconKind.CODE.value: '<path d="M8 7l-5 5 5 5M16 7l5 5-5 5M14 4l-4 16"/>',
    IconKind.TERMINAL.value: '<rect x="3" y="4" width="18" height="16" rx="2"/><path d="M7 9l3 3-3 3M12 15h5"/>',
    IconKind.LAYOUT.value: '<rect x="3" y="3" width="8" height="10" rx="1"/><rect x="13" y="3" width="8" height="6" rx="1"/>'
                           '<rect x="3" y="15" width="8" height="6" rx="1"/><rect x="13" y="11" width="8" height="10" rx="1"/>',
    IconKind.BUG.value: '<rect x="7" y="7" width="10" height="13" rx="5"/><path d="M9 4l2 3M15 4l-2 3M3 12h4M17 12h4M4 18l3-2M20 18l-3-2"/>',
    IconKind.USER_SMILE.value: '<circle cx="12" cy="12" r="9"/><path d="M8 14a4.5 4.5 0 0 0 8 0"/><path d="M9 9.5h.01M15 9.5h.01"/>',
    IconKind.GITHUB.value: (
        '<path d="M9 19c-4 1.4-4-2-6-2.5M15 21v-3.5c0-1 .1-1.4-.5-2 2.8-.3 5.5-1.4 5.5-6a4.6 4.6 0 0 0-1.3-3.2'
        ' 4.2 4.2 0 0 0-.1-3.2s-1.1-.3-3.5 1.3a12 12 0 0 0-6.2 0C6.5 2.8 5.4 3.1 5.4 3.1a4.2 4.2 0 0 0-.1 3.2'
        'A4.6 4.6 0 0 0 4 9.5c0 4.6 2.7 5.7 5.5 6-.6.6-.6 1.2-.5 2V21"/>'
    ),
    IconKind.LINKEDIN.value: '<rect x="3" y="3" width="18" height="18" rx="2"/><path d="M8 10v7M8 7v.01M12 17v-4a2 2 0 0 1 4 0v4M12 10v7"/>',
    IconKind.INSTAGRAM.value: '<rect x="3" y="3" width="18" height="18" rx="5"/><circle cx="12" cy="12" r="4"/><path d="M17.5 6.5h.01"/>',
    IconKind.WHATSAPP.value: (
        '<path d="M3 21l1.6-4.7A8.5 8.5 0 1 1 7.8 19.6z"/>'
        '<path d="M9 9.5c.5 2.5 2.5 4.5 5 5l1-1.5-2-1-1 1c-1-.5-1.5-1-2-2l1-1-1-2z"/>'
    ),
    IconKind.TELEGRAM.value: '<path d="M21 4L3 11l6 2 2 6 3-4 5 4z"/><path d="M9 13l8-6"/>',
    IconKind.PHONE.value: (
        '<path d="M5 4h4l2 5-2.5 1.5a11 11 0 0 0 5 5L15 13l5 2v4a2 2 0 0 1-2 2A16 16 0 0 1 3 6a2 2 0 0 1 2-2"/>'
    ),
    "menu": '<path d="M4 6h16M8 12h12M4 18h16"/>',
    "close": '<path d="M6 6l12 12M18 6L6 18"/>',
    "arrow_right": '<path d="M5 12h14M13 6l6 6-6 6"/>',
    "download": '<path d="M12 4v11M7 10l5 5 5-5M5 20h14"/>',
    "briefcase": '<rect x="3" y="7" width="18" height="13" rx="2"/><path d="M9 7V5a2 2 0 0 1 2-2h2a2 2 0 0 1 2 2v2M3 13h18"/>',
}


def icon_svg(name: IconKind | str, size: int = 24) -> str:
    key = name.value if isinstance(name, IconKind) else name
    if key not in _PATHS:
        raise KeyError(f"No icon named '{key}'")
    return (
        f'<svg class="icon icon-{key}" width="{size}" height="{size}" viewBox="0 0 24 24" fill="none" '
        f'stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round" '
        f'aria-hidden="true">{_PATHS[key]}</svg>'
    )
