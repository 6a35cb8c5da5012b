"""
The MODEL layer contains pure data structures and the path geometry engine.
It has NO knowledge of the GUI (Qt).
It deals with Geometry, Easing and Timing.
"""
