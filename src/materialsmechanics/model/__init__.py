"""
The MODEL layer contains pure data structures: materials, parameters and
derived results. It has NO knowledge of the UI or of any plotting backend.
"""
