"""tcgsearch — pokemontcg.io card search CLI"""
