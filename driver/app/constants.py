DEFAULTS = {
    # Input game path (empty = standard input)
    "INPUT": "",
    # Output game path (empty = standard output)
    "OUTPUT": "",
    # Enable/disable random mutation
    "MUTATION_ENABLED": True,
    # Number of successful edits to apply
    "MUTATION_COUNT": 1,
    # Action profile: remove-only (0), remove-or-add (1) or full (2)
    "MUTATION_PROFILE": "full",
    # Attempt budget per requested edit before giving up
    "MUTATION_ATTEMPTS_PER_SUCCESS": 1000,
    # Lower bound on the attempt budget
    "MUTATION_MIN_ATTEMPTS": 10000,
    # Check adjacency invariants after every edit
    "MUTATION_VERIFY_INVARIANTS": False,
    # Seed for reproducible runs (empty = OS entropy)
    "SEED": None,
    # Restrict to a random bottom SCC before writing
    "BOTTOM_SCC": False,
    # Swap players
    "EVENODD": False,
    # Turn a min game into a max game and vice versa
    "MINMAX": False,
    # Inflate priorities before writing
    "INFLATE": False,
    # Compress priorities before writing
    "COMPRESS": False,
    # Renumber priorities before writing
    "RENUMBER": False,
    # Order nodes by priority before writing
    "ORDER": False,
    # Root log level
    "LOG_LEVEL": "INFO",
}
