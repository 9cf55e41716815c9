# trie_spellcheck/utils - config and logging helpers (import submodules directly)
