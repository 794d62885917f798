# UI.py
""""PySide6 user interface for the scientific calculator.

Structure
---------
- Calculator UI: main window with entry line, result line, indicators and button grid
- Settings UI: modal dialog for user preferences

Responsibilities (Calculator)
-----------------------------
- Build window, displays, layout and buttons
- Translate button clicks and key presses into calculator keys
- Hand every key to CalculatorState.process_key and redraw
- Show calculation errors in a message box that closes itself
- Clipboard integration (copy the result)
- History list: click an entry to reload its expression, clear it with one button


Responsibilities (Settings)
---------------------------

- Load Current Settings and Settings Descriptions via config_manager
- Validate user input (decimal places 0-9)
- Save and apply the new modes and theme immediately
"""""

import logging
import sys

import pyperclip
from PySide6 import QtWidgets
from PySide6.QtCore import Qt, QTimer

from . import config_manager
from . import error as E
from .CalculatorState import CalculatorState, process_key
from .config_manager import AngleMode, DisplayMode

logger = logging.getLogger(__name__)

ERROR_DISPLAY_MS = 2000

# (label, label with 2nd, key, row, column)
BUTTONS = [
    ('2nd', '2nd', '2nd', 0, 0), ('mode', 'mode', 'mode', 0, 1), ('del', 'del', 'del', 0, 2),
    ('◀', '◀', 'left', 0, 3), ('▶', '▶', 'right', 0, 4),
    ('disp', 'disp', 'display', 1, 0), ('log', '10^x', 'log', 1, 1), ('ln', 'e^x', 'ln', 1, 2),
    ('x!', 'x!', 'fact', 1, 3), ('clear', 'clear', 'clear', 1, 4),
    ('EE', 'nPr', 'ee', 2, 0), ('sin', 'sin⁻¹', 'sin', 2, 1), ('cos', 'cos⁻¹', 'cos', 2, 2),
    ('tan', 'tan⁻¹', 'tan', 2, 3), ('÷', '÷', 'divide', 2, 4),
    ('x²', '√', 'x2', 3, 0), ('(', '{', 'leftparen', 3, 1), (')', '}', 'rightparen', 3, 2),
    ('xʸ', 'ʸ√x', 'xy', 3, 3), ('×', '×', 'multiply', 3, 4),
    ('1/x', 'nCr', '1x', 4, 0), ('7', '7', '7', 4, 1), ('8', '8', '8', 4, 2),
    ('9', '9', '9', 4, 3), ('−', '−', 'subtract', 4, 4),
    ('sto', 'rcl', 'sto', 5, 0), ('4', '4', '4', 5, 1), ('5', '5', '5', 5, 2),
    ('6', '6', '6', 5, 3), ('+', '+', 'add', 5, 4),
    ('M+', 'M−', 'mplus', 6, 0), ('1', '1', '1', 6, 1), ('2', '2', '2', 6, 2),
    ('3', '3', '3', 6, 3), ('%', '%', 'percent', 6, 4),
    ('ans', 'MC', 'ans', 7, 0), ('0', '0', '0', 7, 1), ('.', '.', 'decimal', 7, 2),
    ('(−)', 'π', 'neg', 7, 3), ('enter', 'enter', 'enter', 7, 4),
]

# Keys whose 2nd function is a different action, not a different text
SECOND_KEYS = {"sto": "rcl", "mplus": "mminus", "ans": "mc"}

KEY_MAP = {
    "+": "add", "-": "subtract", "*": "multiply", "/": "divide", "%": "percent",
    "=": "enter", ".": "decimal", ",": "decimal", "(": "leftparen", ")": "rightparen",
    "^": "xy", "!": "fact",
    "s": "sin", "c": "cos", "t": "tan", "l": "log", "n": "ln", "r": "sqrt",
    "p": "pi", "e": "euler", "E": "ee", "m": "mode", "M": "mode", "a": "ans",
}
for _digit in "0123456789":
    KEY_MAP[_digit] = _digit

QT_KEY_MAP = {
    Qt.Key.Key_Return: "enter",
    Qt.Key.Key_Enter: "enter",
    Qt.Key.Key_Escape: "clear",
    Qt.Key.Key_Backspace: "del",
    Qt.Key.Key_Delete: "del",
    Qt.Key.Key_Left: "left",
    Qt.Key.Key_Right: "right",
}


class SettingsDialog(QtWidgets.QDialog):
    """""

    Settings window. Modes are offered as drop-downs, booleans as checkboxes and
    the number of decimals as an input field. Values are written through
    config_manager when OK is pressed.

    """""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.widgets = {}

        self.setWindowTitle("Calculator Settings")
        self.setMinimumSize(320, 240)
        main_layout = QtWidgets.QVBoxLayout(self)

        self.setting_value_list = config_manager.load_setting_value("all")
        self.setting_description_list = config_manager.load_setting_description("all")

        choices = {
            "angle_mode": [mode.value for mode in AngleMode],
            "display_mode": [mode.value for mode in DisplayMode],
        }

        for key_value, value in self.setting_value_list.items():
            description = self.setting_description_list.get(key_value, key_value)

            if key_value in choices:
                row_h_layout = QtWidgets.QHBoxLayout()
                combo = QtWidgets.QComboBox()
                combo.addItems(choices[key_value])
                combo.setCurrentText(str(value))
                row_h_layout.addWidget(QtWidgets.QLabel(description))
                row_h_layout.addWidget(combo)
                main_layout.addLayout(row_h_layout)
                self.widgets[key_value] = combo

            elif isinstance(value, bool):
                checkbox = QtWidgets.QCheckBox(description)
                checkbox.setChecked(value)
                main_layout.addWidget(checkbox)
                self.widgets[key_value] = checkbox

            elif isinstance(value, int):
                row_h_layout = QtWidgets.QHBoxLayout()
                input_field = QtWidgets.QLineEdit()
                input_field.setPlaceholderText(str(value))
                row_h_layout.addWidget(QtWidgets.QLabel(description + " (0-9):"))
                row_h_layout.addWidget(input_field)
                row_h_layout.setStretch(1, 1)
                main_layout.addLayout(row_h_layout)
                self.widgets[key_value] = input_field

        button_box = QtWidgets.QDialogButtonBox(QtWidgets.QDialogButtonBox.Ok | QtWidgets.QDialogButtonBox.Cancel)
        main_layout.addWidget(button_box)
        button_box.accepted.connect(self.save_settings)
        button_box.rejected.connect(self.reject)

        self.update_darkmode()

    def save_settings(self):
        new_settings = dict(self.setting_value_list)

        for key_value, widget in self.widgets.items():
            if isinstance(widget, QtWidgets.QComboBox):
                new_settings[key_value] = widget.currentText()

            elif isinstance(widget, QtWidgets.QCheckBox):
                new_settings[key_value] = widget.isChecked()

            elif isinstance(widget, QtWidgets.QLineEdit):
                new_value_str = widget.text().strip()
                if new_value_str == "":
                    continue
                try:
                    new_value_int = int(new_value_str)
                    if not config_manager.MIN_FIX_DECIMALS <= new_value_int <= config_manager.MAX_FIX_DECIMALS:
                        raise ValueError(f"'{new_value_int}' is out of range 0-9.")
                except ValueError as e:
                    logger.warning("Invalid input for %s: %s", key_value, e)
                    QtWidgets.QMessageBox.critical(self, "Invalid Input:",
                                                   f"Error in input for '{key_value}':\n\n{e}\n\nPlease correct your input.")
                    return  # Stop saving!
                new_settings[key_value] = new_value_int

        if config_manager.save_setting(new_settings) != {}:
            self.setting_value_list = new_settings
            self.accept()
        else:
            QtWidgets.QMessageBox.critical(self, "Error",
                                           f"{E.ERROR_MESSAGES['5002']}config.json")

    def update_darkmode(self):
        if self.setting_value_list.get("darkmode"):
            self.setStyleSheet("""
                        QDialog {background-color: #121212;}
                        QLabel {color: white;}
                        QCheckBox {color: white;}
                        QComboBox {background-color: #444444;color: white;}
                        QLineEdit {background-color: #444444;color: white;border: 1px solid #666666;}
                        QDialogButtonBox QPushButton {background-color: #666666;color: white;}""")
        else:
            self.setStyleSheet("")


class CalculatorWindow(QtWidgets.QWidget):

    def __init__(self):
        super().__init__()

        self.setting_value_list = config_manager.load_setting_value("all")
        self.state = CalculatorState(self.setting_value_list, persist=True)
        self.button_objects = {}

        self.setWindowTitle("Scientific Calculator")
        self.resize(360, 560)
        main_v_layout = QtWidgets.QVBoxLayout(self)

        expanding_policy = QtWidgets.QSizePolicy(
            QtWidgets.QSizePolicy.Policy.Expanding,
            QtWidgets.QSizePolicy.Policy.Expanding
        )

        # --- Displays ---
        self.indicators = QtWidgets.QLabel()
        self.entry_display = QtWidgets.QLineEdit()
        self.entry_display.setReadOnly(True)
        self.result_display = QtWidgets.QLineEdit()
        self.result_display.setReadOnly(True)
        self.result_display.setAlignment(Qt.AlignmentFlag.AlignRight)
        font = self.result_display.font()
        font.setPointSize(24)
        self.result_display.setFont(font)

        main_v_layout.addWidget(self.indicators)
        main_v_layout.addWidget(self.entry_display)
        main_v_layout.addWidget(self.result_display)

        tool_row = QtWidgets.QHBoxLayout()
        settings_button = QtWidgets.QPushButton("⚙")
        settings_button.clicked.connect(self.open_settings)
        copy_button = QtWidgets.QPushButton("Copy")
        copy_button.clicked.connect(self.copy_result)
        clear_history_button = QtWidgets.QPushButton("Clear history")
        clear_history_button.clicked.connect(self.clear_history)
        tool_row.addWidget(settings_button)
        tool_row.addWidget(copy_button)
        tool_row.addWidget(clear_history_button)
        main_v_layout.addLayout(tool_row)

        # --- History ---
        self.history_list = QtWidgets.QListWidget()
        self.history_list.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.history_list.itemClicked.connect(self.load_history_item)
        main_v_layout.addWidget(self.history_list, 1)

        # --- Button grid ---
        button_container = QtWidgets.QWidget()
        main_v_layout.addWidget(button_container, 3)
        button_grid = QtWidgets.QGridLayout(button_container)
        button_grid.setSpacing(2)
        button_grid.setContentsMargins(0, 0, 0, 0)

        for label, second_label, key, row, col in BUTTONS:
            button = QtWidgets.QPushButton(label)
            button.setSizePolicy(expanding_policy)
            button.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            button.clicked.connect(lambda checked=False, k=key: self.handle_key(k))
            button_grid.addWidget(button, row, col)
            self.button_objects[key] = (button, label, second_label)

        self.update_darkmode()
        self.update_display()

    # --- Input ---

    def handle_key(self, key):
        if self.state.second and key in SECOND_KEYS:
            key = SECOND_KEYS[key]

        try:
            outcome = process_key(self.state, key)
        except E.InputError as e:
            self.show_error("Input Error", e.message)
            return

        self.update_display()

        if outcome is not None:
            calculation = self.state.last_result
            if calculation is not None and not calculation.ok:
                self.show_error(calculation.error_kind.value,
                                f"{calculation.error_message}\nEquation: {self.state.expression}")
            elif self.setting_value_list.get("copy_on_result"):
                self.copy_result()

    def keyPressEvent(self, event):
        if event.modifiers() & (Qt.KeyboardModifier.ControlModifier | Qt.KeyboardModifier.AltModifier):
            super().keyPressEvent(event)
            return

        key = QT_KEY_MAP.get(event.key()) or KEY_MAP.get(event.text())
        if key:
            self.handle_key(key)
        else:
            super().keyPressEvent(event)

    def load_history_item(self, item):
        try:
            self.state.load_from_history(self.history_list.row(item))
        except E.InputError as e:
            self.show_error("Input Error", e.message)
        self.update_display()

    def clear_history(self):
        self.state.clear_history()
        self.update_display()

    def copy_result(self):
        if self.state.result:
            pyperclip.copy(self.state.result)

    # --- Output ---

    def update_display(self):
        self.entry_display.setText(self.state.expression)
        self.entry_display.setCursorPosition(self.state.cursor)
        self.result_display.setText(self.state.result)

        parts = []
        if self.state.second:
            parts.append("2ND")
        parts.append(self.state.angle_mode.value)
        parts.append(self.state.display_mode.value)
        if self.state.has_memory():
            parts.append("M")
        self.indicators.setText("  ".join(parts))

        for button, label, second_label in self.button_objects.values():
            button.setText(second_label if self.state.second else label)

        # Newest first, same order as state.history
        self.history_list.clear()
        for item in self.state.history:
            self.history_list.addItem(f"{item.get('expression', '')} = {item.get('result', '')}")

    def show_error(self, title, message):
        """Show an error box that closes itself after ERROR_DISPLAY_MS."""
        error_box = QtWidgets.QMessageBox(self)
        error_box.setIcon(QtWidgets.QMessageBox.Critical)
        error_box.setWindowTitle("Calculation error")
        error_box.setText(title)
        error_box.setInformativeText(message)
        error_box.setStandardButtons(QtWidgets.QMessageBox.Ok)
        error_box.setStyleSheet(self.get_message_box_stylesheet())
        QTimer.singleShot(ERROR_DISPLAY_MS, error_box.accept)
        error_box.exec()

    def update_darkmode(self):
        if self.setting_value_list.get("darkmode"):
            for button, label, second_label in self.button_objects.values():
                button.setStyleSheet("background-color: #121212; color: white; font-weight: bold;")
            self.setStyleSheet("background-color: #121212; color: white;")
            self.result_display.setStyleSheet("background-color: #121212; color: white; font-weight: bold;")
        else:
            for button, label, second_label in self.button_objects.values():
                button.setStyleSheet("font-weight: normal;")
            self.setStyleSheet("")
            self.result_display.setStyleSheet("font-weight: bold;")

    def get_message_box_stylesheet(self):
        if self.setting_value_list.get("darkmode"):
            return """
                QMessageBox { background-color: #121212; color: white; }
                QLabel { color: white; }
                QPushButton { background-color: #2e2e2e; color: white; border: 1px solid #444444; padding: 5px 15px; }
            """
        return ""

    def open_settings(self):
        settings_dialog = SettingsDialog(self)
        if settings_dialog.exec():
            # Reload settings after the dialog closes and apply the new modes
            self.setting_value_list = config_manager.load_setting_value("all")
            config = config_manager.load_engine_config(self.setting_value_list)
            self.state.angle_mode = config.angle_mode
            self.state.set_display_mode(config.display_mode, config.fix_decimals)
            self.update_darkmode()
            self.update_display()


def main():
    app = QtWidgets.QApplication(sys.argv)
    window = CalculatorWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
