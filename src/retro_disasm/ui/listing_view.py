"""
逆アセンブルリストを表示するウィジェット。
"""
from typing import List, Optional

from PySide6.QtWidgets import QWidget, QVBoxLayout, QTableWidget, QTableWidgetItem, QHeaderView
from PySide6.QtGui import QColor

from retro_disasm.common.types import ListingLine
from retro_disasm.config.models import DisassemblerConfig
from retro_disasm.core.errors import DecodeError
from retro_disasm.arch.i8086.disassembler import Disassembler, listing_line, resolve_base_address
from retro_disasm.ui.fonts import get_monospace_font

HIGHLIGHT_COLOR = "#404000"  # Dark Yellow
NORMAL_COLOR = "#101010"
ERROR_COLOR = "#602020"

# @intent:responsibility 逆アセンブル結果を表形式で表示し、指定オフセットの行をハイライトします。
class ListingView(QWidget):
    """
    逆アセンブルリストを表示するウィジェット。
    デコードが途中で失敗した場合、それまでの行に続けてエラー行を表示します。
    """
    def __init__(self, parent=None):
        super().__init__(parent)
        self.layout = QVBoxLayout(self)
        self.layout.setContentsMargins(0, 0, 0, 0)

        self.table = QTableWidget()
        self.table.setColumnCount(3)
        self.table.setHorizontalHeaderLabels(["Offset", "Bytes", "Instruction"])
        self.table.horizontalHeader().setSectionResizeMode(0, QHeaderView.ResizeToContents)
        self.table.horizontalHeader().setSectionResizeMode(1, QHeaderView.ResizeToContents)
        self.table.horizontalHeader().setSectionResizeMode(2, QHeaderView.Stretch)
        self.table.setFont(get_monospace_font(10))

        self.table.verticalHeader().setVisible(False)
        self.table.setEditTriggers(QTableWidget.NoEditTriggers)
        self.table.setSelectionBehavior(QTableWidget.SelectRows)
        self.table.setShowGrid(False)
        self.table.setStyleSheet("background-color: #101010; color: #BBBBBB; gridline-color: #303030;")

        self.layout.addWidget(self.table)

        self.lines: List[ListingLine] = []
        self.error: Optional[DecodeError] = None
        self.highlighted_row = -1

    # @intent:responsibility バイト列を逆アセンブルしてテーブルを再構築します。
    def load_bytes(self, data: bytes, config: Optional[DisassemblerConfig] = None, origin: int = 0) -> None:
        config = config or DisassemblerConfig()
        base_address = resolve_base_address(config, origin)
        self.lines = []
        self.error = None
        self.highlighted_row = -1

        try:
            Disassembler(data).run(lambda instruction: self.lines.append(listing_line(instruction, config, base_address)))
        except DecodeError as e:
            self.error = e

        rows = list(self.lines)
        if self.error is not None:
            raw = "" if self.error.value is None else f"{self.error.value:02X}"
            rows.append(ListingLine(base_address + self.error.offset, raw, f"; {self.error}"))

        self.table.setRowCount(len(rows))
        for row, (addr, hex_dump, text) in enumerate(rows):
            self.table.setItem(row, 0, QTableWidgetItem(f"{addr:04X}"))
            self.table.setItem(row, 1, QTableWidgetItem(hex_dump))
            self.table.setItem(row, 2, QTableWidgetItem(text))

        if self.error is not None:
            self._paint_row(len(rows) - 1, QColor(ERROR_COLOR))

    # @intent:responsibility 指定アドレスの命令行をハイライトし、見える位置までスクロールします。
    def highlight_address(self, address: int) -> bool:
        """
        該当する命令が無い場合は False を返し、ハイライトを変更しません。
        """
        row_index = next((i for i, line in enumerate(self.lines) if line.address == address), -1)
        if row_index == -1:
            return False

        if self.highlighted_row != -1:
            self._paint_row(self.highlighted_row, QColor(NORMAL_COLOR))
        self._paint_row(row_index, QColor(HIGHLIGHT_COLOR))
        self.highlighted_row = row_index
        self.table.scrollToItem(self.table.item(row_index, 0), QTableWidget.EnsureVisible)
        return True

    def _paint_row(self, row: int, color: QColor) -> None:
        for col in range(self.table.columnCount()):
            item = self.table.item(row, col)
            if item is not None:
                item.setBackground(color)

    # @intent:responsibility 表示内容をクリアします。
    def clear(self):
        self.lines = []
        self.error = None
        self.highlighted_row = -1
        self.table.setRowCount(0)
