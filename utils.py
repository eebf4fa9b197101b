from typing import Dict, List, Optional, Sequence, Tuple, Union

import pandas as pd
from textblob import TextBlob

from prompts import FIELD_LABELS, TERMINATION_KEYWORDS

FieldValue = Optional[Union[str, List[str]]]


def is_goodbye(text: str, keywords: Sequence[str] = TERMINATION_KEYWORDS) -> bool:
	# Substring match, so "goodbyee" or "weekend" count too
	if not text:
		return False
	lower = text.strip().lower()
	return any(k in lower for k in keywords)


def parse_tech_stack(value: str) -> List[str]:
	if not value:
		return []
	parts = [p.strip() for p in value.split(",")]
	return [p for p in parts if p]


def blob_sentiment(text: str) -> Tuple[float, str]:
	if not text or not text.strip():
		return 0.0, "neutral"
	polarity = float(TextBlob(text).sentiment.polarity)
	if polarity > 0.2:
		return polarity, "positive"
	if polarity < -0.2:
		return polarity, "negative"
	return polarity, "neutral"


def _display_value(value: FieldValue) -> str:
	if value is None:
		return ""
	if isinstance(value, list):
		return ", ".join(value)
	return value


def candidate_frame(candidate: Dict[str, FieldValue], include_missing: bool = True) -> pd.DataFrame:
	"""Two-column Field/Value table of the collected details, in intake order."""
	rows = []
	for key, label in FIELD_LABELS.items():
		value = _display_value(candidate.get(key))
		if value or include_missing:
			rows.append({"Field": label, "Value": value})
	return pd.DataFrame(rows, columns=["Field", "Value"])


def candidate_csv(candidate: Dict[str, FieldValue]) -> bytes:
	# One row, one column per field; served as a browser download only
	columns = list(FIELD_LABELS.keys())
	row = {col: _display_value(candidate.get(col)) for col in columns}
	df = pd.DataFrame([row], columns=columns)
	return df.to_csv(index=False).encode("utf-8")
