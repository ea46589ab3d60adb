"""Constants, parameters and error types shared by the engine."""
