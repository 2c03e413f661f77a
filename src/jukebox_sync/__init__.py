"""JukeboxSync: shared jukebox rooms with voted queues and synchronized playback."""

__version__ = "1.0.0"
