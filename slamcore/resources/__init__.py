"""Resource life cycle, PBR materials, the resource manager and file helpers."""