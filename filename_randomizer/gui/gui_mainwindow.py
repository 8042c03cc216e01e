"""
gui_mainwindow.py - GUI Main Window

Single randomize tab: options, preview table and execution
"""

from pathlib import Path
from typing import Optional, List

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
    QLabel, QLineEdit, QPushButton, QCheckBox, QSpinBox,
    QTableWidget, QTableWidgetItem, QProgressBar,
    QFileDialog, QMessageBox, QHeaderView, QGroupBox
)
from PySide6.QtCore import Slot
from PySide6.QtGui import QColor

from ..core import Renamer, RandomizeOptions, RenameRecord
from .gui_workers import RandomizeWorker


class RandomizeTab(QWidget):
    """Randomize Filenames Tab"""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.records: List[RenameRecord] = []
        self.worker: Optional[RandomizeWorker] = None
        self._dry_run = True
        self._base_dir = Path.cwd()

        self._init_ui()

    def _init_ui(self):
        layout = QVBoxLayout(self)

        # Directory settings group
        dir_group = QGroupBox("Directory Settings")
        dir_layout = QGridLayout(dir_group)

        dir_layout.addWidget(QLabel("Directory:"), 0, 0)
        self.dir_edit = QLineEdit()
        self.dir_edit.setPlaceholderText("Select target directory...")
        dir_layout.addWidget(self.dir_edit, 0, 1)
        self.browse_btn = QPushButton("Browse...")
        self.browse_btn.clicked.connect(self._browse_directory)
        dir_layout.addWidget(self.browse_btn, 0, 2)

        layout.addWidget(dir_group)

        # Naming settings group
        name_group = QGroupBox("Naming Settings")
        name_layout = QGridLayout(name_group)

        options_layout = QHBoxLayout()
        self.recursive_check = QCheckBox("Include Subdirectories")
        self.preserve_check = QCheckBox("Preserve Extensions")
        self.preserve_check.setChecked(True)
        self.hidden_check = QCheckBox("Include Hidden Files")
        options_layout.addWidget(self.recursive_check)
        options_layout.addWidget(self.preserve_check)
        options_layout.addWidget(self.hidden_check)
        options_layout.addStretch()
        name_layout.addLayout(options_layout, 0, 0, 1, 2)

        name_layout.addWidget(QLabel("Random Bytes:"), 1, 0)
        self.length_spin = QSpinBox()
        self.length_spin.setRange(1, 64)
        self.length_spin.setValue(8)
        self.length_spin.setSuffix(" (x2 hex chars)")
        name_layout.addWidget(self.length_spin, 1, 1)

        self.preview_btn = QPushButton("Preview")
        self.preview_btn.clicked.connect(self._do_preview)
        name_layout.addWidget(self.preview_btn, 2, 0, 1, 2)

        layout.addWidget(name_group)

        # Results table
        self.table = QTableWidget()
        self.table.setColumnCount(4)
        self.table.setHorizontalHeaderLabels(["Original Name", "New Name", "Status", "Path"])
        self.table.horizontalHeader().setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch)
        self.table.horizontalHeader().setSectionResizeMode(1, QHeaderView.ResizeMode.Stretch)
        self.table.horizontalHeader().setSectionResizeMode(2, QHeaderView.ResizeMode.ResizeToContents)
        self.table.horizontalHeader().setSectionResizeMode(3, QHeaderView.ResizeMode.Stretch)
        self.table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        layout.addWidget(self.table, 1)

        # Progress and execution
        bottom_layout = QHBoxLayout()

        self.progress_bar = QProgressBar()
        self.progress_bar.setVisible(False)
        bottom_layout.addWidget(self.progress_bar, 1)

        self.execute_btn = QPushButton("Execute Rename")
        self.execute_btn.clicked.connect(self._do_execute)
        self.execute_btn.setEnabled(False)
        self.execute_btn.setStyleSheet("QPushButton { background-color: #4CAF50; color: white; font-weight: bold; padding: 8px 16px; }")
        bottom_layout.addWidget(self.execute_btn)

        layout.addLayout(bottom_layout)

        self.status_label = QLabel("")
        layout.addWidget(self.status_label)

    def _browse_directory(self):
        """Browse and select directory"""
        directory = QFileDialog.getExistingDirectory(self, "Select Directory")
        if directory:
            self.dir_edit.setText(directory)

    def _build_renamer(self, dry_run: bool) -> Optional[Renamer]:
        """Build renamer from the widgets, or None if no directory is set"""
        directory = self.dir_edit.text().strip()
        if not directory:
            QMessageBox.warning(self, "Warning", "Please select a directory first")
            return None

        options = RandomizeOptions(
            recursive=self.recursive_check.isChecked(),
            dry_run=dry_run,
            preserve_extensions=self.preserve_check.isChecked(),
            length=self.length_spin.value(),
            include_hidden=self.hidden_check.isChecked(),
        )
        return Renamer(directory, options)

    def _set_busy(self, busy: bool):
        self.preview_btn.setEnabled(not busy)
        self.browse_btn.setEnabled(not busy)
        self.execute_btn.setEnabled(False)
        self.progress_bar.setVisible(busy)

    def _start(self, renamer: Renamer):
        self._dry_run = renamer.options.dry_run
        self._base_dir = renamer.directory
        self._set_busy(True)
        self.progress_bar.setRange(0, 0)  # Indeterminate until first progress

        self.worker = RandomizeWorker(renamer)
        self.worker.progress.connect(self._on_progress)
        self.worker.finished.connect(self._on_finished)
        self.worker.partial.connect(self._on_partial)
        self.worker.error.connect(self._on_error)
        self.worker.start()

    def _do_preview(self):
        """Generate preview (dry run)"""
        renamer = self._build_renamer(dry_run=True)
        if renamer is None:
            return
        self.preview_btn.setText("Generating...")
        self._start(renamer)

    def _do_execute(self):
        """Execute rename"""
        if not self.records:
            return

        reply = QMessageBox.question(
            self, "Confirm",
            f"Are you sure you want to randomize {len(self.records)} filenames?\n\n"
            "New names are drawn again on execution.\nThis action cannot be undone!",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No
        )
        if reply != QMessageBox.StandardButton.Yes:
            return

        renamer = self._build_renamer(dry_run=False)
        if renamer is None:
            return
        self.execute_btn.setText("Executing...")
        self._start(renamer)

    @Slot(int, int, str)
    def _on_progress(self, current: int, total: int, msg: str):
        """Progress update"""
        self.progress_bar.setRange(0, total)
        self.progress_bar.setValue(current)
        self.status_label.setText(msg[-80:] if len(msg) > 80 else msg)

    @Slot(object)
    def _on_finished(self, records: List[RenameRecord]):
        """Preview or execution complete"""
        self._set_busy(False)
        self.preview_btn.setText("Preview")
        self.execute_btn.setText("Execute Rename")

        if self._dry_run:
            self.records = records
            self._update_table(records, "Will Rename", QColor(0, 150, 0))
            if records:
                self.execute_btn.setEnabled(True)
                self.status_label.setText(f"Will perform {len(records)} rename operations")
            else:
                self.status_label.setText("No files found")
            return

        self.records = []
        self._update_table(records, "Renamed", QColor(0, 100, 200))
        self.status_label.setText("Complete")
        QMessageBox.information(self, "Complete", f"Rename complete!\n\nRenamed: {len(records)}")

    @Slot(object)
    def _on_partial(self, records: List[RenameRecord]):
        """Records completed before a failed rename"""
        self.records = []
        self._update_table(records, "Renamed", QColor(0, 100, 200))

    @Slot(str)
    def _on_error(self, error: str):
        """Preview or execution error"""
        self._set_busy(False)
        self.preview_btn.setText("Preview")
        self.execute_btn.setText("Execute Rename")
        QMessageBox.critical(self, "Error", f"Randomize failed: {error}")

    def _update_table(self, records: List[RenameRecord], status: str, color: QColor):
        """Fill table with rename records"""
        self.table.setRowCount(len(records))

        for i, record in enumerate(records):
            self.table.setItem(i, 0, QTableWidgetItem(record.old_path.name))
            self.table.setItem(i, 1, QTableWidgetItem(record.new_path.name))
            status_item = QTableWidgetItem(status)
            status_item.setForeground(color)
            self.table.setItem(i, 2, status_item)
            try:
                rel_path = str(record.old_path.parent.relative_to(self._base_dir))
            except ValueError:
                rel_path = str(record.old_path.parent)
            self.table.setItem(i, 3, QTableWidgetItem(rel_path))


class MainWindow(QMainWindow):
    """Main window"""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Filename Randomizer")
        self.setMinimumSize(800, 600)

        central = QWidget()
        self.setCentralWidget(central)

        layout = QVBoxLayout(central)

        self.randomize_tab = RandomizeTab()
        layout.addWidget(self.randomize_tab)

        self.statusBar().showMessage("Ready")
