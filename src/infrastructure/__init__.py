"""Infrastructure Layer.

File I/O adapters implementing the domain ports. Every function here
performs I/O and returns or consumes domain Value Objects.
"""
