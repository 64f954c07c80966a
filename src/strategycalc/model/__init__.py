"""
The MODEL layer contains pure data structures.
It has NO knowledge of the GUI (Qt) or of randomness.
It deals with Slots, Cells, Day Results and the calculator state.
"""
