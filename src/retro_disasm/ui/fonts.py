"""
UIフォント管理モジュール。
"""
from PySide6.QtGui import QFont, QFontDatabase

PREFERRED_MONOSPACE_FONTS = ("Consolas", "Menlo", "Monaco", "Courier New")

# @intent:responsibility 利用可能な最適な等幅フォントのQFontを返します。見つからなければQtのシステム等幅フォントを使用します。
def get_monospace_font(size: int = 10) -> QFont:
    available = set(QFontDatabase.families())
    for family in PREFERRED_MONOSPACE_FONTS:
        if family in available:
            return QFont(family, size)

    font = QFontDatabase.systemFont(QFontDatabase.FixedFont)
    font.setPointSize(size)
    return font
