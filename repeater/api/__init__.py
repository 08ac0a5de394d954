"""HTTP API for the text repeater."""
