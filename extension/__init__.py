"""New Relic Lambda extension support code."""
