# CalculatorState.py
"""
Everything the calculator remembers between key presses.

The UI owns one CalculatorState and calls into it for every input action:
editing the entry line, evaluating, switching modes, memory and history.
The engine itself stays stateless; calculate() hands it a fresh EngineConfig.
"""
import logging
import math
from datetime import datetime, timezone

from . import config_manager
from . import error as E
from . import MathEngine
from . import ScientificEngine
from .config_manager import AngleMode, DisplayMode, EngineConfig

logger = logging.getLogger(__name__)

MAX_EXPRESSION_LENGTH = 200
MAX_HISTORY = 50
ANSWER_TOKEN = "Ans"

ANGLE_MODE_CYCLE = [AngleMode.DEG, AngleMode.RAD, AngleMode.GRAD]


def to_number(value):
    """Parse value as float; anything unparsable counts as 0."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def answer_text(value):
    """Render the last answer so the tokenizer reads it back exactly, e.g. '(-1.5E-07)'."""
    return "(" + format(value, ".17G") + ")"


class CalculatorState:

    def __init__(self, settings=None, persist=False):
        if settings is None:
            settings = config_manager.load_setting_value("all")
        config = config_manager.load_engine_config(settings)

        self.persist = persist
        self.expression = ""
        self.result = ""
        self.cursor = 0
        self.last_answer = 0.0
        self.last_result = None
        self.second = False
        self.angle_mode = config.angle_mode
        self.display_mode = config.display_mode
        self.fix_decimals = config.fix_decimals

        if persist:
            self.memory = config_manager.load_memory()
            self.history = config_manager.load_history()[:MAX_HISTORY]
        else:
            self.memory = 0.0
            self.history = []

    @property
    def config(self):
        return EngineConfig(self.angle_mode, self.display_mode, self.fix_decimals)

    # --- Entry editing ---

    def insert(self, text):
        """Insert text at the cursor and move the cursor behind it."""
        if len(self.expression) + len(text) > MAX_EXPRESSION_LENGTH:
            raise E.InputError("Expression too long", code="4001")
        self.expression = self.expression[:self.cursor] + text + self.expression[self.cursor:]
        self.cursor += len(text)
        return self.expression

    def delete_at_cursor(self):
        if self.cursor > 0:
            self.expression = self.expression[:self.cursor - 1] + self.expression[self.cursor:]
            self.cursor -= 1
        return self.expression

    def clear_expression(self):
        self.expression = ""
        self.cursor = 0
        return self.expression

    def clear(self):
        self.expression = ""
        self.result = ""
        self.cursor = 0
        self.second = False

    def set_cursor(self, position):
        self.cursor = max(0, min(position, len(self.expression)))
        return self.cursor

    def move_cursor(self, offset):
        return self.set_cursor(self.cursor + offset)

    def insert_answer(self):
        return self.insert(ANSWER_TOKEN)

    # --- Evaluation ---

    def calculate(self):
        """Evaluate the entry line; the entry text is kept as typed, also on error."""
        if not self.expression.strip():
            self.result = "0"
            self.last_result = None
            return self.result

        problem = self.expression.replace(ANSWER_TOKEN, answer_text(self.last_answer))
        logger.debug("Calculating %r", problem)
        calculation = MathEngine.evaluate_expression(problem, self.config)
        self.last_result = calculation
        self.result = calculation.display_string

        if calculation.ok:
            self.last_answer = calculation.numeric_value
            self.add_to_history(self.expression, self.result)
        return self.result

    # --- Modes ---

    def toggle_angle_mode(self):
        index = ANGLE_MODE_CYCLE.index(self.angle_mode)
        self.angle_mode = ANGLE_MODE_CYCLE[(index + 1) % len(ANGLE_MODE_CYCLE)]
        return self.angle_mode

    def set_display_mode(self, mode, fix_decimals=None):
        self.display_mode = DisplayMode(mode)
        if fix_decimals is not None:
            self.fix_decimals = config_manager.clamp_decimals(fix_decimals)
        return self.display_mode

    def toggle_second(self):
        self.second = not self.second
        return self.second

    # --- Memory ---

    def memory_store(self, value):
        self.memory = to_number(value)
        self._save_memory()
        return self.memory

    def memory_recall(self):
        return self.memory

    def memory_add(self, value):
        self.memory += to_number(value)
        self._save_memory()
        return self.memory

    def memory_subtract(self, value):
        self.memory -= to_number(value)
        self._save_memory()
        return self.memory

    def memory_clear(self):
        self.memory = 0.0
        self._save_memory()
        return self.memory

    def has_memory(self):
        return not ScientificEngine.is_near_zero(self.memory)

    def _save_memory(self):
        if self.persist:
            config_manager.save_memory(self.memory)

    # --- History ---

    def add_to_history(self, expression, result):
        self.history.insert(0, {
            "expression": expression,
            "result": result,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        })
        del self.history[MAX_HISTORY:]
        if self.persist:
            config_manager.save_history(self.history)
        return self.history

    def load_from_history(self, index):
        """Replace the entry line with the expression of history item index."""
        item = self.history[index]
        self.clear_expression()
        self.insert(item["expression"])
        self.result = item["result"]
        return self.expression

    def clear_history(self):
        self.history = []
        if self.persist:
            config_manager.save_history(self.history)
        return self.history


# -----------------------------
# Key dispatch
# -----------------------------

# key -> (text, text with 2nd active); None means "same as without 2nd"
INSERT_KEYS = {
    "decimal": (".", None),
    "add": (" + ", None),
    "subtract": (" − ", None),
    "multiply": (" × ", None),
    "divide": (" ÷ ", None),
    "percent": (" % ", None),
    "leftparen": ("(", "{"),
    "rightparen": (")", "}"),
    "sin": ("sin(", "sin⁻¹("),
    "cos": ("cos(", "cos⁻¹("),
    "tan": ("tan(", "tan⁻¹("),
    "log": ("log(", "10^("),
    "ln": ("ln(", "e^("),
    "x2": ("²", "√("),
    "xy": ("^(", "^(1÷"),
    "1x": ("1÷", " nCr "),
    "neg": ("⁻", "π"),
    "ee": ("E", " nPr "),
    "fact": ("!", None),
    "abs": ("abs(", None),
    "sqrt": ("√(", None),
    "pi": ("π", None),
    "euler": ("e", None),
}
for _digit in "0123456789":
    INSERT_KEYS[_digit] = (_digit, None)

MODE_KEYS = ["2nd", "mode", "display"]

DISPLAY_MODE_CYCLE = [DisplayMode.NORM, DisplayMode.FIX, DisplayMode.SCI, DisplayMode.ENG]


def process_key(state, key):
    """Apply one calculator key to state.

    Returns the new result string for "enter", otherwise None. Unknown keys are
    logged and ignored. InputError from editing is left to the caller.
    """
    second = state.second
    outcome = None

    if key in INSERT_KEYS:
        text, second_text = INSERT_KEYS[key]
        state.insert(second_text if second and second_text else text)

    elif key == "enter":
        outcome = state.calculate()
    elif key == "clear":
        state.clear()
    elif key == "del":
        state.delete_at_cursor()
    elif key == "left":
        state.move_cursor(-1)
    elif key == "right":
        state.move_cursor(1)
    elif key == "ans":
        state.insert_answer()

    elif key == "2nd":
        state.toggle_second()
    elif key == "mode":
        state.toggle_angle_mode()
    elif key == "display":
        index = DISPLAY_MODE_CYCLE.index(state.display_mode)
        state.set_display_mode(DISPLAY_MODE_CYCLE[(index + 1) % len(DISPLAY_MODE_CYCLE)])

    elif key == "sto":
        if state.result:
            state.memory_store(state.result)
    elif key == "rcl":
        state.insert(answer_text(state.memory_recall()))
    elif key == "mplus":
        if state.result:
            state.memory_add(state.result)
    elif key == "mminus":
        if state.result:
            state.memory_subtract(state.result)
    elif key == "mc":
        state.memory_clear()

    else:
        logger.warning("Unhandled key: %s", key)

    # 2nd only applies to the next key
    if key not in MODE_KEYS:
        state.second = False
    return outcome
