import csv
import os
from typing import Sequence

import pandas as pd

from labelops.models.label import LabelRecord

LABEL_FIELDNAMES = [
    "sample_id",
    "labeler_id",
    "predicted_sentiment",
    "confidence_score",
    "time_spent_seconds",
    "is_correct",
    "labeled_at",
]


def ensure_output_dir(output_dir: str) -> None:
    os.makedirs(output_dir, exist_ok=True)


def save_labels_csv(output_dir: str, filename: str, rows: Sequence[LabelRecord]) -> str:
    ensure_output_dir(output_dir)
    path = os.path.join(output_dir, filename)
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=LABEL_FIELDNAMES)
        writer.writeheader()
        for row in rows:
            writer.writerow(row.to_dict())
    return path


def save_frame_csv(output_dir: str, filename: str, frame: pd.DataFrame) -> str:
    ensure_output_dir(output_dir)
    path = os.path.join(output_dir, filename)
    frame.to_csv(path, index=False)
    return path
