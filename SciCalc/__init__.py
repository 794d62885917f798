"""Scientific calculator: expression engine, calculator state and PySide6 UI."""
