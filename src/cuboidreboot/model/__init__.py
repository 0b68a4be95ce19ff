"""
The MODEL layer contains pure data structures and the geometry they obey.
It has NO knowledge of the command line or of how steps are produced
beyond the text format read by ``io``.
"""
