"""Global configuration for modfield."""

import os

# ---------- Finite-field prime ----------
# Fixed modulus for every operation in the package.  P < 2**30, so the
# product of two residues always stays below 2**60.
PRIME = 1_000_000_007

# ---------- Demo ----------
# Number of entries of the inverse table printed by ``run_demo`` (parsed there).
DEMO_TABLE_SIZE = os.environ.get("MODFIELD_DEMO_TABLE_SIZE", "10")
