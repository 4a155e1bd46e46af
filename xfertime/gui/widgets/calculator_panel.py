"""Calculator panel - one transfer direction's inputs, result card and presets."""

import logging

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QFrame, QVBoxLayout, QHBoxLayout, QLabel, QDoubleSpinBox,
    QComboBox, QPushButton,
)

from xfertime.core.exceptions import EstimatorError
from xfertime.core.presets import SPEED_PRESETS, SpeedPreset
from xfertime.core.scenario import Direction, Scenario
from xfertime.core.units import SIZE_UNITS, SPEED_UNITS
from xfertime.gui.themes import (
    c, classification_card_style, classification_color, classification_label,
)

logger = logging.getLogger(__name__)

_ARROWS = {Direction.DOWNLOAD: "↓", Direction.UPLOAD: "↑"}


class CalculatorPanel(QFrame):
    """Card with the size and speed fields for a single direction.

    A field edit replaces only that field of the panel's Scenario and
    recalculates. estimate_changed carries the new TransferEstimate, or None
    when the inputs were rejected.
    """

    estimate_changed = pyqtSignal(object)

    def __init__(self, direction: Direction, parent=None):
        super().__init__(parent)
        self.setObjectName("card")
        self._direction = direction
        self._scenario = Scenario.default(direction)
        self._estimate = None
        self._preset_buttons = {}
        self._setup_ui()
        self._load_scenario()
        self._recalculate()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(28, 24, 28, 24)
        layout.setSpacing(14)

        title = QLabel(f"{_ARROWS[self._direction]}  {self._direction.display_name} Calculator")
        title.setObjectName("panelTitle")
        layout.addWidget(title)
        layout.addSpacing(6)

        # --- File Size ---
        layout.addWidget(self._field_label("File Size"))
        self._size_spin, self._size_combo = self._value_row(layout, SIZE_UNITS, "file_size", "size_unit")

        # --- Speed ---
        layout.addWidget(self._field_label(f"{self._direction.display_name} Speed"))
        self._speed_spin, self._speed_combo = self._value_row(layout, SPEED_UNITS, "speed", "speed_unit")

        # --- Result ---
        self._result_card = QFrame()
        self._result_card.setObjectName("resultCard")
        card_layout = QVBoxLayout(self._result_card)
        card_layout.setContentsMargins(20, 16, 20, 16)
        card_layout.setSpacing(4)

        caption = QLabel(f"{self._direction.display_name} Time")
        caption.setObjectName("resultCaption")
        card_layout.addWidget(caption)

        self._result_value = QLabel("--")
        self._result_value.setObjectName("resultValue")
        card_layout.addWidget(self._result_value)

        self._result_label = QLabel(classification_label(None))
        self._result_label.setObjectName("resultLabel")
        card_layout.addWidget(self._result_label)

        layout.addWidget(self._result_card)

        # --- Presets ---
        layout.addWidget(self._field_label("Quick Presets"))
        presets_row = QHBoxLayout()
        presets_row.setSpacing(8)
        for preset in SPEED_PRESETS:
            btn = QPushButton(preset.name)
            btn.setToolTip(preset.label)
            btn.clicked.connect(lambda _checked=False, p=preset: self.apply_preset(p))
            presets_row.addWidget(btn)
            self._preset_buttons[preset.name] = btn
        presets_row.addStretch()
        layout.addLayout(presets_row)

        layout.addStretch()

    def _field_label(self, text: str) -> QLabel:
        label = QLabel(text)
        label.setObjectName("fieldLabel")
        return label

    def _value_row(self, layout, units, value_field: str, unit_field: str) -> tuple:
        row = QHBoxLayout()
        row.setSpacing(10)

        spin = QDoubleSpinBox()
        spin.setDecimals(3)
        spin.setRange(0.001, 1e12)
        spin.setSingleStep(0.1)
        spin.valueChanged.connect(lambda v, f=value_field: self._on_field_changed(f, v))
        row.addWidget(spin, 1)

        combo = QComboBox()
        combo.addItems(list(units))
        combo.setFixedWidth(96)
        combo.currentTextChanged.connect(lambda t, f=unit_field: self._on_field_changed(f, t))
        row.addWidget(combo)

        layout.addLayout(row)
        return spin, combo

    # ------------------------------------------------------------------ #
    #  State
    # ------------------------------------------------------------------ #

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def scenario(self) -> Scenario:
        return self._scenario

    @property
    def estimate(self):
        return self._estimate

    @property
    def result_text(self) -> str:
        return self._result_value.text()

    @property
    def connection_text(self) -> str:
        return self._result_label.text()

    def preset_button(self, name: str) -> QPushButton:
        return self._preset_buttons[name]

    def set_scenario(self, scenario: Scenario):
        if scenario.direction != self._direction:
            raise ValueError(
                f"{self._direction.display_name} panel cannot show a "
                f"{scenario.direction.display_name} scenario"
            )
        self._scenario = scenario
        self._load_scenario()
        self._recalculate()

    def apply_preset(self, preset: SpeedPreset):
        """Overwrite speed and speed unit with the preset's values."""
        self.set_scenario(self._scenario.apply_preset(preset))

    def _load_scenario(self):
        widgets = (self._size_spin, self._size_combo, self._speed_spin, self._speed_combo)
        for w in widgets:
            w.blockSignals(True)
        self._size_spin.setValue(self._scenario.file_size)
        self._size_combo.setCurrentText(self._scenario.size_unit)
        self._speed_spin.setValue(self._scenario.speed)
        self._speed_combo.setCurrentText(self._scenario.speed_unit)
        for w in widgets:
            w.blockSignals(False)

    def _on_field_changed(self, field: str, value):
        # Other fields keep their scenario values, which may lie outside the widget ranges
        self._scenario = self._scenario.with_values(**{field: value})
        self._recalculate()

    def _recalculate(self):
        try:
            self._estimate = self._scenario.estimate()
        except EstimatorError as e:
            logger.warning(f"{self._direction.display_name} estimate failed: {e}")
            self._estimate = None

        if self._estimate is None:
            self._result_value.setText("--")
        else:
            self._result_value.setText(self._estimate.formatted)
        self.apply_theme()
        self.estimate_changed.emit(self._estimate)

    def apply_theme(self):
        """Re-apply classification colors. Call after theme change."""
        classification = self._estimate.classification if self._estimate else None
        self._result_card.setStyleSheet(classification_card_style(classification))
        self._result_value.setStyleSheet(f"color: {classification_color(classification)};")
        self._result_label.setText(classification_label(classification))
        self._result_label.setStyleSheet(f"color: {c('text_dim')};")
