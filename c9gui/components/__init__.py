"""Demo pages, menu, overlays and search built from the element tree."""