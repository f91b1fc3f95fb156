"""HTTP front end for the bank queue simulator."""
