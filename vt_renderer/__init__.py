"""vt_renderer: render ISO 11783-6 style object pools to pixels.

Typical use::

    from vt_renderer.pool import ObjectPool
    from vt_renderer.renderer import PoolRenderer

    image = PoolRenderer().render_id(pool, working_set_id)
"""
