from __future__ import annotations

from pathlib import Path
import json
import tempfile

from windrank.catalog import load_designs
from windrank.log import setup_logging
from windrank.ranking import rank_designs, summarize
from windrank.tables import comparison_frame


# Records in the same shape as the web page data (camelCase keys, prose ignored).
RECORDS = [
    {"id": "compact", "rotorDiameter": 2.0, "cp": 0.45, "generatorEfficiency": 0.93, "tsr": 6.5,
     "tagline": "Small single rotor"},
    {"id": "twin", "rotorDiameter": 1.8, "cp": 0.44, "generatorEfficiency": 0.9, "tsr": 6, "stages": 2},
]


def main() -> None:
    setup_logging()

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "designs.json"
        path.write_text(json.dumps({"designs": RECORDS}, indent=2), encoding="utf-8")
        designs = load_designs(path)

    print(comparison_frame(summarize(designs).evaluations).round(2))
    print("Best at the top speed point:", rank_designs(designs).name)


if __name__ == "__main__":
    main()
