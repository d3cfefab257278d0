"""regionkeeper — keep hand-written code alive across regenerations.

Generators overwrite their output wholesale. Code placed between protected
region markers survives: the previous body of every region is captured into
a pool and spliced back into the freshly generated file at the marker with
the same id.

    // [[region:imports]]
    import com.example.Custom;
    // [[end]]
"""

__version__ = "0.4.0"
