# apps.__init__.py
