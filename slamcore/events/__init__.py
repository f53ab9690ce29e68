"""Window, input and scene-viewport events with category flags and dispatch."""