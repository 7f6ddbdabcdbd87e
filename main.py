import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

import binary_leds


if __name__ == "__main__":
    binary_leds.main()
