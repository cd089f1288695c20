import sys
from pathlib import Path

# Ensure the project root is on sys.path so `polysolver_pkg` is importable without installing
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))
