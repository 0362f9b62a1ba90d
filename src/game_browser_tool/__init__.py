"""Game browser tool: page extraction and browser session control for browser games."""
