"""Core building blocks: constants, errors, configuration and tree transforms."""
