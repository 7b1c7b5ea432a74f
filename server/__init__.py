"""FastAPI server streaming decoded NMEA sentences over WebSocket."""
