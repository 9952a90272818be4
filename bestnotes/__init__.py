"""The Best Notes App: a terminal take on a small notes app screen flow."""
