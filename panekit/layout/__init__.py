"""Layouts that size and position canvas objects: border, box, center, max, fixed grid, form and grid, plus spacers."""