# src/retro_disasm/ui/app.py
"""
PySide6アプリケーションのエントリポイント。
逆アセンブルリストを表示するウィンドウを起動します。
"""
import sys
from typing import List, Optional

from PySide6.QtWidgets import QApplication, QMainWindow, QFileDialog, QMessageBox
from PySide6.QtGui import QAction

from retro_disasm.config.models import DisassemblerConfig
from retro_disasm.loader.loader import load_program
from .listing_view import ListingView

# @intent:responsibility ファイルを開いて逆アセンブルリストを表示するメインウィンドウ。
class ListingWindow(QMainWindow):
    def __init__(self, config: Optional[DisassemblerConfig] = None, parent=None):
        super().__init__(parent)
        self.config = config or DisassemblerConfig()
        self.setWindowTitle("Retro Disasm")
        self.resize(720, 540)

        self.listing_view = ListingView()
        self.setCentralWidget(self.listing_view)

        open_action = QAction("&Open...", self)
        open_action.triggered.connect(self.open_file_dialog)
        self.menuBar().addMenu("&File").addAction(open_action)

    def open_file_dialog(self):
        path, _ = QFileDialog.getOpenFileName(self, "Open program", "", "All Files (*)")
        if path:
            self.open_file(path)

    # @intent:responsibility ファイルを読み込み、リストを更新します。読み込み失敗はダイアログで通知します。
    def open_file(self, path: str) -> bool:
        try:
            image = load_program(path, self.config.input_format)
        except (OSError, ValueError) as e:
            QMessageBox.critical(self, "Load Error", str(e))
            return False

        self.listing_view.load_bytes(image.data, self.config, image.origin)
        self.setWindowTitle(f"Retro Disasm - {path}")
        if self.listing_view.error is not None:
            self.statusBar().showMessage(str(self.listing_view.error))
        else:
            self.statusBar().showMessage(f"{len(self.listing_view.lines)} instructions")
        return True

# @intent:responsibility アプリケーションを起動し、メインウィンドウを表示します。
def main(paths: Optional[List[str]] = None, config: Optional[DisassemblerConfig] = None) -> int:
    app = QApplication.instance() or QApplication(sys.argv)
    window = ListingWindow(config)
    for path in paths or []:
        window.open_file(path)
    window.show()
    return app.exec()

if __name__ == '__main__':
    sys.exit(main(sys.argv[1:]))
