import sys
import os

# Ensure the package can be imported if this config is used standalone
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dubins_tour.types import Configuration

class BenchmarkConfig:
    # --- Experiment Settings ---
    NODE_COUNTS = [5, 10, 20, 40]       # Problem sizes to test
    TURNING_RADII = [0.5, 1.0, 2.0, 4.0] # Dubins turning radii [m]
    NUM_TRIALS = 10                      # Random instances per (size, radius)
    RANDOM_SEED_BASE = 1000              # Base seed for reproducibility

    # --- Output Paths ---
    _BASE_DIR = os.path.dirname(os.path.abspath(__file__))
    _PROJECT_DIR = os.path.dirname(_BASE_DIR)
    LOG_DIR = os.path.join(_PROJECT_DIR, "logs", "experiments_oracles")

    # --- Workspace ---
    AREA_WIDTH = 50.0              # meters
    AREA_HEIGHT = 50.0             # meters

    # --- Start & End (the vehicle returns to where it left) ---
    START_CONFIG = Configuration(0.0, 0.0, 0.0)
    END_CONFIG = START_CONFIG
