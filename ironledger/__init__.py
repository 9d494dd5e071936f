"""IronLedger: a personal strength-training logger."""
