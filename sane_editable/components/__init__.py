# sane-editable components
# sanitizer: pure text normalization; editor: edit reconciliation controller
